"""Core application for the hospital administration backend.

This package contains models, services, serializers, views and route
registrations for hospitals, wards, staff, patients and clinical records.
"""
