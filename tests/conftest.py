from datetime import datetime, timezone

import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Template

from fargate_infra.config import get_stack_config
from fargate_infra.stack import FargateServiceStack

SYNTH_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
REGION = "us-east-1"


# 合成に時間がかかるため、スタックはセッション全体で 1 回だけ作成して共有する
@pytest.fixture(scope="session")
def stack() -> FargateServiceStack:
    app = cdk.App()
    config = get_stack_config(name="Development")
    return FargateServiceStack(
        app,
        config.stack_id,
        config=config,
        now=SYNTH_TIME,
        env=cdk.Environment(region=REGION),
    )


@pytest.fixture(scope="session")
def template(stack: FargateServiceStack) -> Template:
    return Template.from_stack(stack)


@pytest.fixture(scope="session")
def resources(template: Template) -> dict:
    return template.to_json()["Resources"]
