class NeverType:
    pass


Never = NeverType()
