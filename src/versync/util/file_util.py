import json


def parse_json(filename):
    with open(filename, 'r', encoding='utf8') as f:
        return json.load(f)


def to_json(data, indent=2):
    # non-ASCII kept as-is, always a trailing newline
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def write_json(filename, data):
    content = to_json(data)
    with open(filename, 'w', encoding='utf8') as f:
        f.write(content)


def read_file_contents(filename):
    with open(filename, encoding='utf8') as fp:
        return fp.read()


def write_file_contents(filename, content):
    with open(filename, "w", encoding='utf8') as fp:
        fp.write(str(content))
