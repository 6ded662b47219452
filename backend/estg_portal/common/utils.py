from datetime import date, datetime


def _convert_to_date_or_datetime(dt_obj):
    if not dt_obj or not isinstance(dt_obj, str):
        return dt_obj
    original_str = dt_obj
    try:
        if ' ' in dt_obj or 'T' in dt_obj:
            dt_obj = dt_obj.replace('Z', '').split('+')[0].split('.')[0]
            for fmt in ('%Y-%m-%dT%H:%M:%S', '%Y-%m-%d %H:%M:%S'):
                try:
                    return datetime.strptime(dt_obj, fmt)
                except ValueError:
                    continue
            return datetime.strptime(original_str.split('T')[0].split()[0], '%Y-%m-%d').date()
        return datetime.strptime(dt_obj, '%Y-%m-%d').date()
    except ValueError:
        return original_str


def format_date_long(dt_obj):
    """Formats an API timestamp as 'January 5, 2025'."""
    if not dt_obj:
        return ''
    dt_obj = _convert_to_date_or_datetime(dt_obj)
    if not isinstance(dt_obj, (datetime, date)):
        return str(dt_obj)
    return f"{dt_obj.strftime('%B')} {dt_obj.day}, {dt_obj.year}"


def excerpt(text, length=150):
    """Cuts `text` to `length` characters followed by '...' when it is longer."""
    text = text or ''
    if len(text) > length:
        return text[:length] + '...'
    return text


def is_truncated(text, length=150):
    return len(text or '') > length
