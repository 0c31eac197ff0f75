"""Kernel – errors, domain events and result types shared by every layer."""
