from http import HTTPStatus

for _status in HTTPStatus:
    globals()[f"HTTP_{_status.value}"] = _status.value

del _status


def is_100(status_code):
    return 100 <= status_code <= 199


def is_200(status_code):
    return 200 <= status_code <= 299


def is_300(status_code):
    return 300 <= status_code <= 399


def is_400(status_code):
    return 400 <= status_code <= 499


def is_500(status_code):
    return 500 <= status_code <= 599

