# CDK アプリのエントリーポイント
# スタック設定とデプロイ先を読み込み、Fargate サービススタックを CloudFormation テンプレートに合成する
import argparse
import logging
from datetime import datetime, timezone

import aws_cdk as cdk

from fargate_infra.config import DeployTarget, SynthMetadata, get_stack_config
from fargate_infra.middleware import Artifact, set_logger_config
from fargate_infra.stack import FargateServiceStack

logger = logging.getLogger(__name__)


# コマンドライン引数を解析して返す関数
def load_options() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fargate service synthesis arguments")
    # 使用するスタック設定名（環境ラベル）
    parser.add_argument("-c", "--config", type=str, default="Development")

    return parser.parse_args()


# スタックを合成するメイン関数
def main() -> None:
    args = load_options()

    # -----------------------------
    # Setup
    # -----------------------------
    current_time = datetime.now(timezone.utc)
    version = current_time.strftime("%Y%m%d%H%M%S")
    artifact = Artifact(version=version, job_type="synth")
    set_logger_config(log_file_path=artifact.file_path("log.txt"))
    stack_config = get_stack_config(name=args.config)
    # CDK_DEFAULT_ACCOUNT / CDK_DEFAULT_REGION が未設定の場合は環境非依存のスタックになる
    target = DeployTarget.from_env()
    logger.info(f"{artifact.key_prefix=}, {args=}, {target=}")

    # -----------------------------
    # Synthesize Stack
    # -----------------------------
    app = cdk.App()
    stack = FargateServiceStack(
        app,
        stack_config.stack_id,
        config=stack_config,
        now=current_time,
        env=target.to_environment(),
    )
    app.synth()

    # -----------------------------
    # Store Artifacts
    # -----------------------------
    meta_data = SynthMetadata(
        stack_config=stack_config,
        target=target,
        bucket_name=stack.bucket_name,
        version=version,
        start_time=current_time,
        end_time=datetime.now(timezone.utc),
        artifact_key_prefix=artifact.key_prefix,
    )
    meta_data.save_as_json(artifact.file_path("metadata.json"))


if __name__ == "__main__":
    main()
