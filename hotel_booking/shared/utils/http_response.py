import json

from pydantic import ValidationError

from hotel_booking.shared.applications import Outcome


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def outcome_response(outcome: Outcome, data: dict | list | None = None) -> dict:
    """Outcome を API Gateway のレスポンスに変換する"""
    body: dict = {
        "status": "success" if outcome.is_success else "error",
        "message": outcome.message,
    }
    if outcome.is_success and data is not None:
        body["data"] = data
    return api_response(outcome.status_code, body)


def bad_request(error: ValueError) -> dict:
    """リクエストの検証エラーを 400 レスポンスに変換する"""
    body: dict = {"status": "error", "message": "Invalid request"}
    if isinstance(error, ValidationError):
        body["details"] = error.errors(include_url=False)
    else:
        body["details"] = [{"msg": str(error)}]
    return api_response(400, body)
