from aws_cdk import RemovalPolicy, SecretValue
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct
from datadog_cdk_constructs_v2 import DatadogLambda


class Observability(Construct):
    """可観測性を管理する Construct (Datadog版)

    SSM Parameter Store の API Key から Secrets Manager Secret を作成し、
    ホテル参照 API の Lambda 関数を Datadog で計装する。
    ログは Datadog Lambda Extension が直接送信するため Forwarder は使わない。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: list[_lambda.Function],
        datadog_api_key_ssm_parameter_name: str = "/event-hotel-api/datadog-api-key",
        service_name: str = "event-hotel-api",
        env: str = "dev",
    ) -> None:
        super().__init__(scope, id)

        self.api_key_secret = secretsmanager.Secret(
            self,
            "DatadogApiKeySecret",
            secret_string_value=SecretValue.ssm_secure(
                datadog_api_key_ssm_parameter_name
            ),
            removal_policy=RemovalPolicy.DESTROY,
        )

        datadog_lambda = DatadogLambda(
            self,
            "DatadogLambda",
            python_layer_version=122,
            extension_layer_version=92,
            api_key_secret_arn=self.api_key_secret.secret_arn,
            enable_datadog_tracing=True,
            enable_datadog_logs=True,
            capture_lambda_payload=False,
            site="datadoghq.com",
            service=service_name,
            env=env,
        )
        datadog_lambda.add_lambda_functions(functions)
