"""Maintenance jobs for the offers application's MongoDB database"""
