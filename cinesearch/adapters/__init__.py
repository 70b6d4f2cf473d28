"""Adaptateurs : implementations concretes des ports du domaine."""
