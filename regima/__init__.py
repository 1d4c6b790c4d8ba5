"""
RégimA Zone site toolkit.

Hosts the static site builder (`regima.builder`), the mock gateway service
(`regima.gateway`) and the SkinTwin cognitive layer (`regima.cognitive`).
"""

__version__ = "1.0.0"
