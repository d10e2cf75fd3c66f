"""HTTP routers for the users and projects resources."""
