"""
Source Code Root Module

This module serves as the root for the source code of the forecast
position service.

Layer Structure:
- Domain: Core business logic, entities and the error/result model
- Application: Use cases (forecast upsert, position aggregation) and DTOs
- Infrastructure: MongoDB persistence, event publishers and health checks
- Presentation: FastAPI routers and HTTP error mapping
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
