"""
The MODEL layer contains the cached data and the rule deciding when it is stale.
It never inverts anything itself; that is the controller's job.
"""
