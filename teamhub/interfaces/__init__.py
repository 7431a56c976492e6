"""Interface adapters exposing the application."""
