"""Engine services: catalog cache, resolver, action registry, dispatcher."""
