import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import LAYER_RUNTIME

SERVICE_NAME = "hotel-service"


class Functions(Construct):
    """ホテル参照 API の Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.ITable,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.list_hotels = self._create_function(
            "ListHotelsLambda",
            "services.hotel.handlers.list_hotels.lambda_handler",
            table,
            common_layer,
        )

        self.get_hotel = self._create_function(
            "GetHotelLambda",
            "services.hotel.handlers.get_hotel.lambda_handler",
            table,
            common_layer,
        )

        # 参照専用 API のため書き込み権限は付与しない
        for fn in self.all_functions:
            table.grant_read_data(fn)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [self.list_hotels, self.get_hotel]

    def _create_function(
        self,
        id: str,
        handler: str,
        table: dynamodb.ITable,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=LAYER_RUNTIME,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
