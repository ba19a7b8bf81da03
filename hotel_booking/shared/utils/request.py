import json
from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def parse_request(model: type[M], event: APIGatewayProxyEventV2) -> M:
    """JSON ボディ・クエリ・パスパラメータを結合してリクエストモデルに変換する

    不正な入力は ValueError（pydantic.ValidationError を含む）として送出する。
    """
    body = json.loads(event.decoded_body) if event.decoded_body else {}
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    params = {
        **(event.query_string_parameters or {}),
        **(event.path_parameters or {}),
    }
    return model.model_validate({**body, **params})
