import asyncio

from presign import create_service, load_config, load_env_file

DEMO_KEY = "gym_memory.png"


async def main():
    # Reads AWS_REGION, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_BUCKET_NAME
    load_env_file()
    service = create_service(load_config())

    buckets = await service.alist_buckets()
    print("buckets: ", buckets)

    get_url, put_url = await asyncio.gather(
        service.apresign_get(DEMO_KEY),
        service.apresign_put(DEMO_KEY, "image/png"),
    )
    print("presigned url for image: ", get_url)
    print("presigned upload url for image: ", put_url)

if __name__ == "__main__":
    asyncio.run(main())
