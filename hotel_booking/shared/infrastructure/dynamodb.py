import os

import boto3
from boto3.dynamodb.types import TypeSerializer

_serializer = TypeSerializer()


def get_table(table_name: str | None = None, dynamodb=None):
    """DynamoDB テーブルリソースを取得する

    テーブル名が指定されない場合は環境変数 TABLE_NAME を使う。
    """
    resource = dynamodb or boto3.resource("dynamodb")
    return resource.Table(table_name or os.getenv("TABLE_NAME"))


def serialize_item(item: dict) -> dict:
    """リソース形式のアイテムを低レベル API (TransactWriteItems) の形式に変換する"""
    return {key: _serializer.serialize(value) for key, value in item.items()}


def query_all(table, **kwargs) -> list[dict]:
    """ページネーションを辿って Query の全件を取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


class DynamoDBSequence:
    """アトミックカウンタによる連番採番

    SEQUENCE#<name> アイテムの value を ADD で加算し、加算後の値を返す。
    """

    def __init__(self, table, name: str) -> None:
        self._table = table
        self._name = name

    def next_value(self) -> int:
        response = self._table.update_item(
            Key={"PK": f"SEQUENCE#{self._name}", "SK": "SEQUENCE"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["value"])
