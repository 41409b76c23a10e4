"""Registrations that let :func:`mentionkit.mention` accept third-party models."""
