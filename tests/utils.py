from mock import MagicMock


def json_response(data):
    response = MagicMock()
    response.json.return_value = data
    return response


def stream_response(chunks):
    response = MagicMock()
    response.iter_content.return_value = chunks

    request = MagicMock()
    request.__enter__.return_value = response
    request.__exit__.return_value = False

    return request, response


def write_env_file(path, versions):
    with path.open('w') as fout:
        for index, version in enumerate(versions, 1):
            fout.write("VERSION_{}={}\n".format(index, version))
