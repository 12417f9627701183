"""Inventory Rules Service"""
