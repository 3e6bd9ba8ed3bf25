import functools

import contract_addresses


def override_settings(**attrs):
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kw):
            settings = contract_addresses.default_settings
            original_values = {attr: getattr(settings, attr) for attr in attrs}
            for attr, value in attrs.items():
                setattr(settings, attr, value)
            try:
                return fn(*args, **kw)
            finally:
                for attr, value in original_values.items():
                    setattr(settings, attr, value)

        return wrapper

    return decorator
