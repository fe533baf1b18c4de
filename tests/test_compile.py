
def test_compile():
    # Every module imports with only the core dependencies installed
    import geodatum.angles
    import geodatum.conversion
    import geodatum.coordinates
    import geodatum.datum
    import geodatum.ellipsoid
    import geodatum.geodesic
    import geodatum.projection
    import geodatum.reduction
    import geodatum.utils.functions
    import geodatum.utils.logging
