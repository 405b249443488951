"""
Publishers package
"""
from oms.publishers.event_publisher import EventPublisher

__all__ = ["EventPublisher"]
