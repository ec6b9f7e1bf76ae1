"""Interfaces the harness checks targets against."""
