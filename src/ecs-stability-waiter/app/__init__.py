"""ECS Stability Waiter GitHub Action."""
