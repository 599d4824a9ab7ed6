"""Index coverage core: parameters, configuration and the sweep driver."""
