"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    All table access goes through this function so the table name is read
    from the environment in one place.

    Example:
        dynamo = get_dynamo()
        item = dynamo.get_item({"PK": create_pk("123"), "SK": create_cycle_sk()})

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If FLOWCAST_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['FLOWCAST_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "FLOWCAST_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_condition: Optional[Key] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key condition.

        Follows pagination so large log histories come back complete.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_condition: Optional sort key condition

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_condition is not None:
            key_condition = key_condition & sort_key_condition

        query_args = {"KeyConditionExpression": key_condition}
        items = []
        while True:
            response = self.table.query(**query_args)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_args["ExclusiveStartKey"] = last_key

    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_log_sk(date_str: str) -> str:
    """Create sort key for daily logs."""
    return f"LOG#{date_str}"

def create_cycle_sk() -> str:
    """Create sort key for the cycle settings item."""
    return "CYCLE#PROFILE"
