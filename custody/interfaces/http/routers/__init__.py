"""HTTP routers grouped by custody component."""
