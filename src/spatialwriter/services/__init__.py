"""Service layer: operations returning ServiceResult for the CLI and other front ends."""
