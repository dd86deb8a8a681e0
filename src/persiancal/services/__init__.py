"""Service layer — calendar operations returning ServiceResult."""
