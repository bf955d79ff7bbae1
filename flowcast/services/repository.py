"""
Persistence service for daily logs and cycle settings.

This module stores and loads a user's daily logs and cycle settings in
DynamoDB. It converts between table items and models so the prediction
engine only ever sees DailyLog and CycleParameters.

Typical usage:
    repository = CycleRepository()
    logs = repository.get_daily_logs(user_id)
    params = repository.get_cycle_parameters(user_id)
"""
from typing import Any, Dict, List
from datetime import date
from decimal import Decimal

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from boto3.dynamodb.conditions import Key

from flowcast.models.cycle import CycleParameters, DEFAULT_CYCLE_PARAMETERS
from flowcast.models.log import DailyLog
from flowcast.services.exceptions import RepositoryError
from flowcast.services.utils import format_date
from flowcast.utils.dynamo import get_dynamo, create_pk, create_log_sk, create_cycle_sk

logger = Logger()

LOG_SK_PREFIX = "LOG#"

def _from_dynamo(value: Any) -> Any:
    """Convert DynamoDB Decimals back to plain ints."""
    if isinstance(value, Decimal):
        return int(value)
    return value

class CycleRepository:
    """Service for reading and writing cycle data."""

    def __init__(self):
        """Initialize repository with the shared DynamoDB client."""
        self.dynamo = get_dynamo()

    def get_daily_logs(self, user_id: str) -> List[DailyLog]:
        """
        Get all daily logs for a user.

        Args:
            user_id: User identifier

        Returns:
            List of DailyLog objects in no particular order

        Raises:
            RepositoryError: If the query fails
        """
        try:
            items = self.dynamo.query_items(
                partition_key="PK",
                partition_value=create_pk(user_id),
                sort_key_condition=Key("SK").begins_with(LOG_SK_PREFIX)
            )
        except ClientError as e:
            logger.error("Failed to load daily logs", extra={
                "user_id": user_id,
                "error": str(e)
            })
            raise RepositoryError("Could not load daily logs") from e

        logs = [self._item_to_log(item) for item in items]
        logger.info("Loaded daily logs", extra={
            "user_id": user_id,
            "log_count": len(logs)
        })
        return logs

    def save_daily_log(self, user_id: str, log: DailyLog) -> DailyLog:
        """
        Create or replace the log for the log's date.

        Args:
            user_id: User identifier
            log: Daily log to store

        Returns:
            The stored log, bound to the user

        Raises:
            RepositoryError: If the write fails
        """
        stored = log.model_copy(update={
            "user_id": user_id,
            "id": log.id or log.date.isoformat()
        })
        item = {
            "PK": create_pk(user_id),
            "SK": create_log_sk(stored.date.isoformat()),
            **stored.model_dump(mode="json", exclude_none=True)
        }
        try:
            self.dynamo.put_item(item)
        except ClientError as e:
            logger.error("Failed to save daily log", extra={
                "user_id": user_id,
                "date": str(log.date),
                "error": str(e)
            })
            raise RepositoryError("Could not save daily log") from e
        return stored

    def delete_daily_log(self, user_id: str, log_date: date) -> None:
        """
        Delete the log stored for a date.

        Raises:
            RepositoryError: If the delete fails
        """
        try:
            self.dynamo.delete_item({
                "PK": create_pk(user_id),
                "SK": create_log_sk(log_date.isoformat())
            })
        except ClientError as e:
            logger.error("Failed to delete daily log", extra={
                "user_id": user_id,
                "date": str(log_date),
                "error": str(e)
            })
            raise RepositoryError("Could not delete daily log") from e

    def get_cycle_parameters(self, user_id: str) -> CycleParameters:
        """
        Get the user's cycle settings.

        Missing items or missing fields fall back to the defaults.

        Args:
            user_id: User identifier

        Returns:
            CycleParameters

        Raises:
            RepositoryError: If the read fails
        """
        try:
            item = self.dynamo.get_item({
                "PK": create_pk(user_id),
                "SK": create_cycle_sk()
            })
        except ClientError as e:
            logger.error("Failed to load cycle settings", extra={
                "user_id": user_id,
                "error": str(e)
            })
            raise RepositoryError("Could not load cycle settings") from e

        if not item:
            return DEFAULT_CYCLE_PARAMETERS

        cycle_length = _from_dynamo(item.get("cycle_length"))
        period_length = _from_dynamo(item.get("period_length"))
        return CycleParameters(
            cycle_length=cycle_length if cycle_length is not None else DEFAULT_CYCLE_PARAMETERS.cycle_length,
            period_length=period_length if period_length is not None else DEFAULT_CYCLE_PARAMETERS.period_length,
            last_period_start=item.get("last_period_start") or None
        )

    def update_cycle_parameters(self, user_id: str, params: CycleParameters) -> CycleParameters:
        """
        Store the user's cycle settings, replacing any previous ones.

        Raises:
            RepositoryError: If the write fails
        """
        item = {
            "PK": create_pk(user_id),
            "SK": create_cycle_sk(),
            "cycle_length": params.cycle_length,
            "period_length": params.period_length,
            "last_period_start": format_date(params.last_period_start)
        }
        try:
            self.dynamo.put_item(item)
        except ClientError as e:
            logger.error("Failed to save cycle settings", extra={
                "user_id": user_id,
                "error": str(e)
            })
            raise RepositoryError("Could not save cycle settings") from e
        logger.info("Cycle settings updated", extra={"user_id": user_id})
        return params

    @staticmethod
    def _item_to_log(item: Dict[str, Any]) -> DailyLog:
        fields = {
            key: _from_dynamo(value)
            for key, value in item.items()
            if key not in ("PK", "SK")
        }
        return DailyLog(**fields)
