"""Trimmed copies of iwaatch markup used by the provider tests."""

SEARCH_PAGE = """
<div class="row">
<div class="col-xs-12 col-sm-6 col-md-3 movie-item">
  <a href="https://iwaatch.com/movie/the-matrix">
    <div class="post-img" style="background-image: url('https://iwaatch.com/img/matrix.jpg')"></div>
    <div class="post-title">The Matrix</div>
  </a>
</div>
<div class="col-xs-12 col-sm-6 col-md-3 movie-item">
  <a href="https://iwaatch.com/movie/no-poster">
    <div class="post-img"></div>
    <div class="post-title">No Poster</div>
  </a>
</div>
<div class="col-xs-12 col-sm-6 col-md-3 movie-item">
  <a href="https://iwaatch.com/movie/the-matrix-reloaded">
    <div class="post-img" style="background-image:url('https://iwaatch.com/img/reloaded.jpg')"></div>
    <div class="post-title"> The Matrix Reloaded </div>
  </a>
</div>
</div>
"""

EMPTY_SEARCH_PAGE = """
<div class="row"><p class="no-results">No results found</p></div>
"""

DETAIL_PAGE = """
<div id="movie-desc" class="col-md-8">
  <h2 class="title">The Matrix</h2>
  <p>1999</p>
  <h2 class="story">A hacker learns the truth about his reality.</h2>
</div>
<ul id="info">
  <li><span class="glyphicon glyphicon-time"></span> 2h 16m</li>
  <li><span class="glyphicon glyphicon-star-empty" aria-hidden="true"></span> 8.7</li>
</ul>
"""

DETAIL_PAGE_NO_INFO = """
<div id="movie-desc">
  <h2>The Matrix</h2>
  <h2>A hacker learns the truth about his reality.</h2>
</div>
"""

DETAIL_PAGE_DURATION_ONLY = """
<div id="movie-desc">
  <h2>The Matrix</h2>
  <h2>A hacker learns the truth about his reality.</h2>
</div>
<ul id="info">
  <li><span class="glyphicon glyphicon-time"></span> 2h 16m</li>
  <li><span class="glyphicon glyphicon-star-empty"></span></li>
</ul>
"""

PLAYBACK_PAGE = """
<video id="player" controls>
  <source src="https://cdn.iwaatch.com/m/matrix-1080.mp4" type="video/mp4" size="1080">
  <source src="https://cdn.iwaatch.com/m/matrix-720.mp4" type="video/mp4" size="720">
</video>
"""

PLAYBACK_PAGE_WITH_TRACKS = """
<video id="player" controls>
  <source src="https://cdn.iwaatch.com/m/matrix-480.mp4" type="video/mp4" size="480">
  <source src="https://cdn.iwaatch.com/m/matrix.webm" type="video/webm" size="480">
  <track src="https://cdn.iwaatch.com/s/matrix-en.vtt" kind="subtitles" label="English">
  <track src="https://cdn.iwaatch.com/s/matrix-ar.vtt" kind="subtitles" srclang="ar" label="Arabic" default>
</video>
"""
