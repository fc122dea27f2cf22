"""Garment EMS analytics package.

This package is organized by feature modules (staff, attendance, stitching,
salary, pieces) around a shared time-series aggregator, with a thin Flask
controller layer over service/repository layers that read from the remote
EMS backend.
"""
