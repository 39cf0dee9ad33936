from personhub.domain.enums.create_outcome import CreateOutcome
__all__ = [
    "CreateOutcome",
]
