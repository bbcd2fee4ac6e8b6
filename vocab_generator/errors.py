class VocabError(Exception):
  pass


class ParseError(VocabError):
  """A corpus field holds a token we don't know how to read."""

  def __init__(self, name, token, context):
    self.name = name
    self.token = token
    self.context = context
    super().__init__("invalid {} {!r} in {!r}".format(name, token, context))


class ConfigError(VocabError):
  pass


class EncodeError(VocabError):
  pass


class DecodeError(VocabError):
  pass
