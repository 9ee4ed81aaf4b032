"""Conectores HTTP por upstream (Evolution API, Serper)."""
