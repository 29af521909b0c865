"""Application layer - Orchestration and port definitions.

This layer contains:
- Service: The payment request pipeline (validate -> save -> notify)
- Validator: Request validation rules
- Ports: Abstract interfaces for external dependencies

The application layer depends on the domain layer and on ports.
Infrastructure implementations are injected through the constructor.
"""
