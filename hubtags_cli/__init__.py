"""hubtags-cli — digest Docker Hub tag listings into version groups."""
