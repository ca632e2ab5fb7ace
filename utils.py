def is_ajax_request(request):
    """Return True when the request was made by XMLHttpRequest.

    Raises:
        ValueError: If no request is given
    """
    if request is None:
        raise ValueError("request is required")

    if request.headers is not None:
        return request.headers.get("X-Requested-With") == "XMLHttpRequest"
    return False
