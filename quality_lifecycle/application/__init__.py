"""Application layer: collaborator ports, orchestration services and DTOs."""
