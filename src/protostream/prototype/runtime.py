"""Static parts of assembled documents: stylesheet and navigation runtime.

Templates use string.Template placeholders ($name) because the CSS and
JavaScript bodies are full of braces.
"""

from string import Template

TAILWIND_CDN = "https://cdn.tailwindcss.com"
HOTSPOT_CLASS = "show-hotspots"
ACTIVE_CLASS = "active"
DEFAULT_CLASS = "screen--default"

PROTOTYPE_STYLE = Template("""\
    * { margin: 0; padding: 0; box-sizing: border-box; }
    html, body {
      width: ${width}px;
      min-height: ${height}px;
      overflow-x: hidden;
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    }

    /* Only the active screen is visible */
    .screen {
      display: none;
      min-height: ${height}px;
      width: 100%;
      animation: screenFadeIn 0.15s ease-out;
    }
    .screen.active { display: block; }
    @keyframes screenFadeIn {
      from { opacity: 0.8; }
      to { opacity: 1; }
    }

    a { cursor: pointer; text-decoration: none; color: inherit; }
    a:hover { opacity: 0.9; }
    button { cursor: pointer; }
    input, textarea, select { pointer-events: auto; -webkit-appearance: none; }
    .overflow-y-auto { overflow-y: auto; }
    .overflow-y-scroll { overflow-y: scroll; }

    /* Navigation triggers */
    [${attr}] {
      cursor: pointer;
      transition: box-shadow 0.2s ease, transform 0.15s ease;
    }
    [${attr}]:hover {
      box-shadow: 0 0 0 2px rgba(147, 51, 234, 0.5), 0 0 12px rgba(147, 51, 234, 0.3);
      transform: scale(1.01);
    }
    [${attr}]:active { transform: scale(0.99); }

    /* Hotspots: persistent outline on every trigger */
    body.${hotspot} [${attr}] {
      box-shadow: 0 0 0 2px rgba(147, 51, 234, 0.4), 0 0 8px rgba(147, 51, 234, 0.2);
      position: relative;
    }
    body.${hotspot} [${attr}]::after {
      content: '';
      position: absolute;
      inset: -2px;
      border: 2px dashed rgba(147, 51, 234, 0.5);
      border-radius: inherit;
      pointer-events: none;
      animation: hotspotPulse 2s ease-in-out infinite;
    }
    @keyframes hotspotPulse {
      0%, 100% { opacity: 0.5; }
      50% { opacity: 1; }
    }""")

# Navigation state machine: one state per screen container, entered by
# activating a trigger whose target names an existing container. Unknown
# targets leave the current screen showing.
NAVIGATION_SCRIPT = Template("""\
(function () {
  var entryId = ${entry_id};
  var attr = ${attr};
  var hotspotClass = ${hotspot};

  function showScreen(screenId) {
    var target = screenId ? document.getElementById(screenId) : null;
    if (!target || !target.classList.contains('screen')) {
      return false;
    }
    var screens = document.querySelectorAll('.screen');
    for (var i = 0; i < screens.length; i++) {
      screens[i].classList.remove('${active}');
    }
    target.classList.add('${active}');
    target.scrollTop = 0;
    window.scrollTo(0, 0);
    return true;
  }

  window.addEventListener('message', function (e) {
    var data = e.data;
    if (!data || typeof data !== 'object') {
      return;
    }
    if (data.type === 'toggleHotspots') {
      if (data.show) {
        document.body.classList.add(hotspotClass);
      } else {
        document.body.classList.remove(hotspotClass);
      }
    } else if (data.type === 'navigate' && typeof data.screenId === 'string') {
      showScreen(data.screenId);
    }
  });

  document.addEventListener('click', function (e) {
    var node = e.target;
    while (node && node !== document.body && node.nodeType === 1) {
      if (node.hasAttribute(attr)) {
        e.preventDefault();
        e.stopPropagation();
        showScreen(node.getAttribute(attr));
        return;
      }
      var href = node.tagName === 'A' ? node.getAttribute('href') : null;
      if (href && href.charAt(0) === '#') {
        e.preventDefault();
        e.stopPropagation();
        showScreen(href.substring(1));
        return;
      }
      node = node.parentNode;
    }
  }, true);

  window.addEventListener('hashchange', function () {
    showScreen(window.location.hash.substring(1));
  });

  if (!showScreen(window.location.hash.substring(1))) {
    showScreen(entryId);
  }
})();""")

PROTOTYPE_DOCUMENT = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=${width}, initial-scale=1.0, maximum-scale=1.0, user-scalable=no">
  <title>${title}</title>
${stylesheets}  <style>
${style}
  </style>
</head>
<body${body_class}>
${sections}
<script>
${script}
</script>
</body>
</html>
""")

EMPTY_DOCUMENT = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=${width}, initial-scale=1.0">
  <title>${title}</title>
${stylesheets}</head>
<body class="min-h-screen bg-gray-100 flex items-center justify-center">
  <div class="text-center text-gray-500">
    <p class="text-lg">No screens yet</p>
    <p class="text-sm mt-2">Generate some screens to preview your prototype</p>
  </div>
</body>
</html>
""")

SCREEN_DOCUMENT = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=${width}, initial-scale=1.0">
  <title>${title}</title>
${stylesheets}  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    html, body { width: ${width}px; min-height: ${height}px; overflow-x: hidden; }
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; }
  </style>
</head>
<body>
${markup}
</body>
</html>
""")
