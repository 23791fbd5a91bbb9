"""Runtime wiring: configuration, worker pool and scan runner."""
