"""
PORTS - Interfaces the domain needs and infrastructure implements.
"""
