import pytest

from fargate_infra.aws import controller
from fargate_infra.aws import find_orphaned_log_buckets, list_log_buckets, log_bucket_prefix

BUCKETS = [
    "development-us-east-1-2024-01-02t00-00-00-000z",
    "development-us-east-1-2024-01-01t00-00-00-000z",
    "development-us-west-2-2024-01-01t00-00-00-000z",
    "unrelated-bucket",
]


class StubS3Client:
    def list_buckets(self) -> dict:
        return {"Buckets": [{"Name": name} for name in BUCKETS]}


@pytest.fixture
def stub_s3(monkeypatch):
    calls = []

    def client(service_name, **kwargs):
        calls.append((service_name, kwargs))
        return StubS3Client()

    monkeypatch.setattr(controller.boto3, "client", client)
    return calls


def test_log_bucket_prefix():
    assert log_bucket_prefix("Development", "us-east-1") == "development-us-east-1-"


def test_list_log_buckets(stub_s3):
    assert list_log_buckets("Development", "us-east-1") == [
        "development-us-east-1-2024-01-01t00-00-00-000z",
        "development-us-east-1-2024-01-02t00-00-00-000z",
    ]
    assert stub_s3 == [("s3", {"region_name": "us-east-1"})]


def test_find_orphaned_log_buckets(stub_s3):
    orphaned = find_orphaned_log_buckets(
        "Development", "us-east-1", current_bucket="development-us-east-1-2024-01-02t00-00-00-000z"
    )

    assert orphaned == ["development-us-east-1-2024-01-01t00-00-00-000z"]


@pytest.mark.integration  # 実際の AWS アカウントに接続するため、-m integration を指定したときだけ実行する
def test_list_log_buckets_integration():
    bucket_names = list_log_buckets("Development", "us-east-1")

    assert all(name.startswith("development-us-east-1-") for name in bucket_names)
