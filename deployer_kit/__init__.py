"""deployer-kit — generate Foundry deployer scripts from compiled contract ABIs."""

__version__ = "0.1.0"
