"""
Pydantic models for FlashArray REST 2.x responses consumed by the sensor.
"""
