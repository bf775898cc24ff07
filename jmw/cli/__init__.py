"""Command-line interface for jmw"""
