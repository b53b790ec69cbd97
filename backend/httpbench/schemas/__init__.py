"""Pydantic Schemas — benchmark result documents read and written by the aggregator."""
