"""Builders for Docker Hub tag listing payloads used across the tests."""

TAGS_URL = "https://registry.hub.docker.com/v2/repositories/{repo}/tags"


def image(os_="linux", arch="amd64", variant=None):
    return {"os": os_, "architecture": arch, "variant": variant}


def result(name, *images):
    return {"name": name, "images": list(images)}


def page(results, next_url=None):
    return {"count": len(results), "next": next_url, "previous": None, "results": results}
