"""Command line interface for plugin-deploy"""
