"""Automated accessibility audits for a locally served web application."""
