"""Skill CRUD service."""
