import logging
import requests

from .exceptions import DownloadError


_logger = logging.getLogger(__name__)


def download(url, output_file, timeout=None):
    """
    Stream the content of url into output_file.

    Raises:
        DownloadError: when the request fails or returns an error status.

    Returns:
        int: The number of bytes written.
    """
    data_size = 0

    try:
        with requests.get(url, stream=True, timeout=timeout) as req:
            req.raise_for_status()

            with output_file.open('wb') as fout:
                for chunk in req.iter_content(chunk_size=8192):
                    data_size += len(chunk)
                    fout.write(chunk)
    except (requests.RequestException, OSError) as exc:
        raise DownloadError(
            "Failed to download {}: {}".format(url, exc)
        ) from exc

    _logger.debug("Wrote %s bytes to %s", data_size, output_file)

    return data_size


def fetch_json(url, timeout=None):
    """
    Fetch a json document from the github api.

    Raises:
        requests.RequestException: when the request fails.
        ValueError: when the body isn't json.
    """
    req = requests.get(
        url,
        timeout=timeout,
        headers={"Accept": "application/vnd.github+json"},
    )
    req.raise_for_status()

    return req.json()
