# 監査ログバケットの棚卸しを行うスクリプト
# 合成のたびに新しいバケット名が生成されるため、現在使用中以外のバケットを一覧表示する（削除はしない）
import argparse
import logging

from fargate_infra.aws import find_orphaned_log_buckets, list_log_buckets
from fargate_infra.config import DeployTarget, get_stack_config
from fargate_infra.middleware import Artifact, set_logger_config

logger = logging.getLogger(__name__)


# コマンドライン引数を解析して返す関数
def load_options() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit log bucket inventory arguments")
    parser.add_argument("-c", "--config", type=str, default="Development")
    # 未指定の場合は CDK_DEFAULT_REGION を使う
    parser.add_argument("-r", "--region", type=str, default=None)
    # 現在のスタックが使っているバケット名（metadata.json の bucket_name）
    parser.add_argument("--current", type=str, default=None)

    return parser.parse_args()


def main() -> None:
    args = load_options()

    artifact = Artifact(version="latest", job_type="list_log_buckets")
    set_logger_config(log_file_path=artifact.file_path("log.txt"))
    stack_config = get_stack_config(name=args.config)
    region = args.region or DeployTarget.from_env().region
    if region is None:
        raise ValueError("Region is required: pass --region or set CDK_DEFAULT_REGION")

    if args.current is None:
        bucket_names = list_log_buckets(label=stack_config.name, region=region)
    else:
        bucket_names = find_orphaned_log_buckets(label=stack_config.name, region=region, current_bucket=args.current)

    for bucket_name in bucket_names:
        print(bucket_name)


if __name__ == "__main__":
    main()
