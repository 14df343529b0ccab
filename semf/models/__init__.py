"""Value models produced and consumed by the scoring pipeline."""
