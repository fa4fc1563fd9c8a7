from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.layers import LAYER_RUNTIME


class Api(Construct):
    """API Gateway Construct

    GET /hotels と GET /hotels/{hotel_id} をセッショントークンの
    Lambda Authorizer の背後に公開する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.ITable,
        list_hotels: _lambda.Function,
        get_hotel: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "HotelRestApi",
            rest_api_name="Event Hotel API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        # Lambda Authorizer: Bearer トークンに対応するセッションがあれば許可
        self.authorizer_fn = _lambda.Function(
            self,
            "SessionTokenAuthorizerFn",
            runtime=LAYER_RUNTIME,
            handler="authorizer.handler.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            environment={
                "TABLE_NAME": table.table_name,
            },
        )
        table.grant_read_data(self.authorizer_fn)

        authorizer = apigw.TokenAuthorizer(
            self,
            "SessionTokenAuthorizer",
            handler=self.authorizer_fn,
            identity_source=apigw.IdentitySource.header("Authorization"),
            results_cache_ttl=Duration.seconds(300),
        )

        # 401 レスポンスにも JSON 本文を返す
        self.rest_api.add_gateway_response(
            "UnauthorizedResponse",
            type=apigw.ResponseType.UNAUTHORIZED,
            status_code="401",
            templates={"application/json": '{"message": "Unauthorized"}'},
        )

        # GET /hotels -> Lambda (list_hotels)
        hotels_resource = self.rest_api.root.add_resource("hotels")
        hotels_resource.add_method(
            "GET",
            apigw.LambdaIntegration(list_hotels),
            authorizer=authorizer,
        )

        # GET /hotels/{hotel_id} -> Lambda (get_hotel)
        hotel_resource = hotels_resource.add_resource("{hotel_id}")
        hotel_resource.add_method(
            "GET",
            apigw.LambdaIntegration(get_hotel),
            authorizer=authorizer,
        )
