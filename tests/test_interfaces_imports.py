def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import codecollector.core.interfaces as I

    assert hasattr(I, "WalkerProtocol")


def test_default_walker_satisfies_protocol():
    from codecollector.core.interfaces import WalkerProtocol
    from codecollector.io.walker import FileWalker

    assert isinstance(FileWalker(), WalkerProtocol)
