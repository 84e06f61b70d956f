class JourneyDocumentError( Exception ):
    """
    A stored journey document could not be read back into a Journey.
    """

    def __init__( self, message : str, path : str = None, detail = None ):
        self.path = path
        self.detail = detail
        if path:
            message = f'{message} [{path}]'
        super().__init__( message )
        return


class JourneyInputError( ValueError ):
    """
    User-supplied input failed one of the presence/format checks done
    before a journey, country or location is created.  The message is
    suitable for showing to the user.
    """

    def __init__( self, message : str, value : str = None ):
        self.message = message
        self.value = value
        super().__init__( message )
        return


class MalformedPathError( ValueError ):
    """
    A path's category keywords are unknown or do not follow the
    journey > country > location hierarchy.
    """
    pass
