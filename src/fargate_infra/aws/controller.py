# デプロイ済みの AWS リソース（S3）を参照するコントローラー関数群
# 合成のたびに新しい監査ログバケットが作られるため、同じ環境・リージョンのバケットを棚卸しする
import logging

import boto3

logger = logging.getLogger(__name__)


# バケット名のプレフィックス（"<ラベル>-<リージョン>-"）を返す関数
def log_bucket_prefix(label: str, region: str) -> str:
    return f"{label}-{region}-".lower()


# 指定した環境ラベル・リージョンで作成された監査ログバケット名を名前順で返す関数
def list_log_buckets(label: str, region: str) -> list[str]:
    prefix = log_bucket_prefix(label, region)
    logger.info(f"Start listing log buckets: {prefix=}")
    s3_client = boto3.client("s3", region_name=region)
    response = s3_client.list_buckets()
    bucket_names = sorted(
        bucket["Name"] for bucket in response.get("Buckets", []) if bucket["Name"].startswith(prefix)
    )
    logger.info(f"Found {len(bucket_names)} log buckets: {bucket_names=}")
    return bucket_names


# 現在のスタックが使っていない監査ログバケット（過去の合成で作られたもの）を返す関数
# 参照のみで削除は行わない
def find_orphaned_log_buckets(label: str, region: str, current_bucket: str | None) -> list[str]:
    orphaned = [name for name in list_log_buckets(label, region) if name != current_bucket]
    logger.info(f"Found {len(orphaned)} orphaned log buckets: {current_bucket=}")
    return orphaned
