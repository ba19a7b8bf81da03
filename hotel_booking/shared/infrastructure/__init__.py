from .dynamodb import DynamoDBSequence, get_table, query_all, serialize_item

__all__ = ["DynamoDBSequence", "get_table", "query_all", "serialize_item"]
