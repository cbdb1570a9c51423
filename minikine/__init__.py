"""Local DynamoDB and Kinesis emulators with resource bootstrap."""

__version__ = "0.1.0"
