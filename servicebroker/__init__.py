"""Servicebroker - Open Service Broker lifecycle engine for Python.

This module provides the public API for building service brokers.
"""

from .application import ServiceBroker, ServiceBrokerBuilder
from .config import BrokerSettings
from .controller import Outcome
from .domain import Catalog, OperationState, Plan, ServiceBrokerException, ServiceDefinition
from .events import EventFlowRegistries, EventFlowRegistry, LoggingFlows
from .services import (
    CatalogService,
    ServiceInstanceBindingService,
    ServiceInstanceService,
)

__all__ = [
    # Application
    "BrokerSettings",
    "Outcome",
    "ServiceBroker",
    "ServiceBrokerBuilder",
    # Catalog
    "Catalog",
    "Plan",
    "ServiceDefinition",
    # Services
    "CatalogService",
    "ServiceInstanceBindingService",
    "ServiceInstanceService",
    # Event flows
    "EventFlowRegistries",
    "EventFlowRegistry",
    "LoggingFlows",
    # Domain
    "OperationState",
    "ServiceBrokerException",
]
