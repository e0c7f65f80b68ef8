from unittest.mock import patch, MagicMock
import json
import pytest

from presign.base.exceptions import AccessDeniedError
from presign.cli import main


@pytest.fixture
def env(clean_env, tmp_path):
    clean_env.chdir(tmp_path)
    clean_env.setenv("AWS_REGION", "ap-south-1")
    clean_env.setenv("AWS_ACCESS_KEY_ID", "key")
    clean_env.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    clean_env.setenv("AWS_BUCKET_NAME", "demo-bucket")
    return clean_env


@pytest.fixture
def svc(env):
    service = MagicMock()
    service.list_buckets.return_value = ["demo-bucket", "archive"]
    service.presign_get.return_value = "https://get-url"
    service.presign_put.return_value = "https://put-url"
    with patch("presign.cli.create_service", return_value=service) as factory:
        yield service, factory


class TestOperations:
    def test_list_buckets(self, svc, capsys):
        main(["list-buckets"])
        assert json.loads(capsys.readouterr().out) == ["demo-bucket", "archive"]

    def test_presign_get(self, svc, capsys):
        service, _ = svc
        main(["--expires-in", "60", "presign-get", "gym_memory.png"])
        assert capsys.readouterr().out.strip() == "https://get-url"
        service.presign_get.assert_called_once_with("gym_memory.png", 60)

    def test_presign_put(self, svc, capsys):
        service, _ = svc
        main(["--content-type", "image/png", "presign-put", "gym_memory.png"])
        assert capsys.readouterr().out.strip() == "https://put-url"
        service.presign_put.assert_called_once_with("gym_memory.png", "image/png", 3600)

    def test_demo(self, svc, capsys):
        service, _ = svc
        main(["demo"])
        out = json.loads(capsys.readouterr().out)
        assert out == {
            "buckets": ["demo-bucket", "archive"],
            "get_url": "https://get-url",
            "put_url": "https://put-url",
        }
        service.presign_get.assert_called_once_with("gym_memory.png", 3600)

    def test_overrides_reach_config(self, svc):
        _, factory = svc
        main(["--bucket", "other", "--region", "eu-west-1", "list-buckets"])
        config = factory.call_args.args[0]
        assert config.bucket_name == "other"
        assert config.region_name == "eu-west-1"

    def test_env_file(self, svc, env, tmp_path):
        _, factory = svc
        env.delenv("AWS_BUCKET_NAME")
        env_file = tmp_path / "local.env"
        env_file.write_text("AWS_BUCKET_NAME=from-file\n")
        main(["--env-file", str(env_file), "list-buckets"])
        assert factory.call_args.args[0].bucket_name == "from-file"


class TestFailures:
    def test_missing_key_argument(self, svc):
        with pytest.raises(SystemExit) as exc_info:
            main(["presign-get"])
        assert exc_info.value.code == 2

    def test_unknown_operation(self, svc):
        with pytest.raises(SystemExit) as exc_info:
            main(["delete-bucket"])
        assert exc_info.value.code == 2

    def test_missing_credentials(self, env, capsys):
        env.delenv("AWS_SECRET_ACCESS_KEY")
        with patch("presign.cli.create_service") as factory:
            with pytest.raises(SystemExit) as exc_info:
                main(["list-buckets"])
        assert exc_info.value.code == 1
        assert "AWS_SECRET_ACCESS_KEY" in capsys.readouterr().err
        factory.assert_not_called()

    def test_provider_error(self, svc, capsys):
        service, _ = svc
        service.list_buckets.side_effect = AccessDeniedError("Failed to list buckets.", code="AccessDenied")
        with pytest.raises(SystemExit) as exc_info:
            main(["list-buckets"])
        assert exc_info.value.code == 1
        assert "AccessDenied" in capsys.readouterr().err

    def test_invalid_input(self, svc, capsys):
        service, _ = svc
        service.presign_get.side_effect = ValueError("expires_in must be positive, got 0.")
        with pytest.raises(SystemExit) as exc_info:
            main(["--expires-in", "0", "presign-get", "gym_memory.png"])
        assert exc_info.value.code == 1
        assert "expires_in" in capsys.readouterr().err
