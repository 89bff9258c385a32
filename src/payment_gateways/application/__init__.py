"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: PaymentService, the validate -> process -> log workflow
- Ports: Abstract interfaces for gateway products, factories and collaborators
- DTOs: Data transfer objects for use case output

The application layer depends only on the domain layer.
Gateway families and collaborators are injected via ports.
"""
