from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import (
    Api,
    Database,
    Functions,
    Layers,
    Observability,
)


class EventHotelApiStack(Stack):
    """イベント参加者向けホテル参照 API のスタック"""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
        )

        api = Api(
            self,
            "Api",
            table=database.table,
            list_hotels=fns.list_hotels,
            get_hotel=fns.get_hotel,
        )

        Observability(
            self,
            "Observability",
            functions=[*fns.all_functions, api.authorizer_fn],
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
