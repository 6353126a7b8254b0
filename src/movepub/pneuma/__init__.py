"""
Pneuma - On-chain interaction layer for movepub.

Provides the Aptos REST client and transaction utilities for publishing
Move packages.

Uses httpx + aptos-sdk's BCS/signing types instead of the SDK's async
RestClient.
"""
