# ABOUTME: Shared utilities for logging and console output
# ABOUTME: Keeps presentation concerns out of the normalization core
