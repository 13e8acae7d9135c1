"""Packet building and sending."""
