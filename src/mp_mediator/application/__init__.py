"""Application layer – key derivation, pipeline behaviors and dispatch."""
