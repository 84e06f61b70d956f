from typing import Optional


def is_blank( obj ):
    if obj is None:
        return True
    if not isinstance( obj, str ):
        return False
    return bool( obj.strip() == '' )


def strip_or_none( value : Optional[str] ) -> Optional[str]:
    if value is None:
        return None
    return value.strip()
