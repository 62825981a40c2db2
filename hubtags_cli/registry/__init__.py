"""Docker Hub access: image references and the tag listing endpoint."""
