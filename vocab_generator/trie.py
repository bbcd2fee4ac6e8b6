class Trie:
  """Prefix tree over characters. Children are always visited in ascending order."""

  def __init__(self, words=None):
    self.children = {}
    for word in words or []:
      self.insert(word)

  def insert(self, word):
    node = self
    for letter in word:
      if letter not in node.children:
        node.children[letter] = Trie()
      node = node.children[letter]

  def items(self):
    return sorted(self.children.items())

  def is_leaf(self):
    return not self.children

  def words(self, prefix=''):
    if self.is_leaf():
      return [prefix] if prefix else []
    words = []
    for k, v in self.items():
      words += v.words(prefix + k)
    return words

  def serialize(self):
    """Pre-order `{char}{num_children}` dump; the count is omitted on leaves."""
    out = []
    self._serialize(out)
    return "".join(out)

  def _serialize(self, out):
    for k, v in self.items():
      out.append(k)
      if v.children:
        out.append(str(len(v.children)))
      v._serialize(out)
