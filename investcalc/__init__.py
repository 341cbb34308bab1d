"""Investment comparison calculator backend."""
