"""Setup (provisioning) services.

This package contains the per-service helpers that *create* or *describe* the
resources the local emulator is expected to hold (DynamoDB tables, Kinesis
streams).
"""
