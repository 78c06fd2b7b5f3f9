"""Core building blocks shared by all neo-access features."""
