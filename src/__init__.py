"""
Source Code Root Module

This module serves as the root for the source code of the application.

Layer Structure:
- Domain: Core business logic and entities
- Application: Use cases and DTOs
- Infrastructure: External systems and services implementations
- Presentation: Router, route table and controllers of the JSON API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
