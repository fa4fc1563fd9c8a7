import os

# ハンドラモジュールは import 時に boto3 リソースを生成するため、先に環境変数を設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hotel-service")
