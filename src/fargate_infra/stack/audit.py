# ALB アクセスログ（監査ログ）を保存する S3 バケットを宣言するモジュール
# バケット名は環境ラベル・リージョン・合成時刻から生成する
import logging
from datetime import datetime, timezone

from aws_cdk import RemovalPolicy
from aws_cdk import aws_elasticloadbalancingv2 as elbv2
from aws_cdk import aws_s3 as s3
from constructs import Construct

logger = logging.getLogger(__name__)


# 日時をミリ秒精度・UTC の ISO 8601 文字列に変換する関数（例: "2024-01-01T00:00:00.000Z"）
def to_iso8601(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# 監査ログバケット名を生成する関数
# "<ラベル>-<リージョン>-<ISO8601 時刻>" の ':' と '.' を '-' に置換して小文字化する
# 合成のたびに時刻が変わるため、同じ設定でも毎回異なる名前になる
def generate_bucket_name(label: str, region: str, now: datetime) -> str:
    timestamp = to_iso8601(now).replace(":", "-").replace(".", "-")
    return f"{label}-{region}-{timestamp}".lower()


# アクセスログ保存用の S3 バケットを作成する関数
# スタック削除時にオブジェクトごと削除され、デプロイ期間を超えて保持しない
def build_log_bucket(scope: Construct, bucket_name: str) -> s3.Bucket:
    bucket = s3.Bucket(
        scope,
        "LogBucket",
        bucket_name=bucket_name,
        removal_policy=RemovalPolicy.DESTROY,
        auto_delete_objects=True,
        versioned=True,
    )
    logger.info(f"Declared log bucket: {bucket_name=}")
    return bucket


# ALB のアクセスログ出力先にバケットを設定する関数
def enable_access_logs(load_balancer: elbv2.ApplicationLoadBalancer, bucket: s3.IBucket, prefix: str) -> None:
    load_balancer.log_access_logs(bucket, prefix)
    logger.info(f"Enabled access logs: {prefix=}")
