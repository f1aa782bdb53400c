class InvariantViolation(Exception):
    """A committed page layout breaks a structural invariant."""
