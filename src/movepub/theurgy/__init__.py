"""
Theurgy - Command implementations for movepub.

Each module corresponds to a top-level CLI command:
- deploy:  Compile and publish the Move package
- balance: Query the deployer account's APT balance
"""
