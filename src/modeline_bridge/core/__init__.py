"""Engine core: alias table, option applier, host collaborators and runner."""
