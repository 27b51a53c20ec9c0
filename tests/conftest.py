"""Shared fixtures: a small signup form rendered into a fresh document."""

import pytest

from validador.dom import Document

SIGNUP_FORM = """
<form id="signup">
  <div class="row"><input type="text" name="username" value=""></div>
  <div class="row"><input type="email" name="email" value=""></div>
  <div class="row"><input type="password" name="password" value=""></div>
  <div class="row">
    <input type="radio" name="plan" value="free">
    <input type="radio" name="plan" value="pro">
  </div>
  <div class="row">
    <input type="checkbox" name="topics" value="news">
    <input type="checkbox" name="topics" value="offers">
  </div>
  <div class="row">
    <select name="country">
      <option value="0">Choose</option>
      <option value="cl">Chile</option>
      <option value="pe">Peru</option>
    </select>
  </div>
  <textarea name="bio"></textarea>
  <span id="error-email"></span>
</form>
<div id="errors"></div>
"""


@pytest.fixture
def document() -> Document:
    return Document(SIGNUP_FORM)


@pytest.fixture
def alerts(document: Document) -> list[str]:
    """Messages passed to ``window.alert()`` during the test."""
    return document.window.alerts
