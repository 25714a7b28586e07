def missing(value):
    """
    A value is missing when it's absent, null or a blank string.
    """
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == '':
        return True
    return False

def input_check(record, *fields):
    """
    Verify required fields are present in a request body.

    :param record: Parsed request body.
    :type record: dict
    :param fields: Names of the required fields.
    :return: A list of error messages, one per missing field, or `None`.
    """
    record = record or {}
    errors = []
    for field in fields:
        if missing(record.get(field)):
            errors.append('No %s specified.' % (field))
    if errors:
        return errors
    return None
