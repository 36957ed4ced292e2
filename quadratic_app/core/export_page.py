"""Page template for the standalone HTML export.

The script below is the browser-side implementation of the math, view
window, mapper, renderer and quiz rules. It holds no numbers of its own:
every constant is read from ``CONFIG``, which the exporter fills from
``plot_constants`` and the export snapshot. Any change to an algorithm in
``quadratic_app.core`` must be made here as well.
"""

TITLE_MARKER = "__EXPORT_TITLE__"
CONFIG_MARKER = "__EXPORT_CONFIG__"
FOOTER_MARKER = "__EXPORT_FOOTER__"
OVERVIEW_MARKER = "__EXPORT_OVERVIEW__"
CONFIG_PREFIX = "const CONFIG = "

EXPORT_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>__EXPORT_TITLE__</title>
    <style>
      * { box-sizing: border-box; }
      body { font-family: Inter, system-ui, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif; margin: 0; color: #111827; background: linear-gradient(to bottom, #eef2ff, white, #eff6ff); }
      header { position: sticky; top: 0; background: #ffffffaa; backdrop-filter: blur(8px); border-bottom: 1px solid #e5e7eb; }
      h1 { color: #4338ca; margin: 0; font-size: 22px; font-weight: 800; }
      .container { max-width: 1024px; margin: 0 auto; padding: 24px; }
      .header-row { display: flex; justify-content: space-between; align-items: center; padding: 14px 24px; }
      .card { background: #fff; border: 1px solid #e5e7eb; border-radius: 16px; box-shadow: 0 4px 16px rgba(0, 0, 0, .06); padding: 16px; }
      .btn { background: #4f46e5; color: #fff; border: none; border-radius: 8px; padding: 10px 14px; cursor: pointer; }
      .btn:hover { background: #4338ca; }
      .btn.secondary { background: #e5e7eb; color: #111827; }
      .row { display: grid; gap: 16px; }
      .grid-2 { grid-template-columns: 1fr 1fr; }
      .grid-3 { grid-template-columns: repeat(3, 1fr); }
      label { font-weight: 600; font-size: 14px; }
      input[type=range] { width: 100%; }
      input[type=number] { width: 100%; padding: 8px 10px; border: 1px solid #e5e7eb; border-radius: 8px; }
      .badge { display: inline-block; padding: 4px 8px; border-radius: 8px; background: #eef2ff; color: #3730a3; font-weight: 600; }
      .value { font-size: 12px; color: #4b5563; font-weight: 400; }
      canvas { width: 100%; border: 1px solid #e5e7eb; border-radius: 8px; margin: 12px 0; }
      .options { display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }
      .option-row { display: flex; align-items: center; gap: 8px; border: 1px solid #e5e7eb; border-radius: 8px; padding: 8px; font-weight: 400; }
      .option-row.correct { background: #f0fdf4; border-color: #86efac; }
      .option-row.incorrect { background: #fef2f2; border-color: #fca5a5; }
      .explain { margin-top: 6px; font-size: 14px; }
      .explain.correct { color: #065f46; }
      .explain.incorrect { color: #7f1d1d; }
      .hidden { display: none; }
      #score { margin-left: auto; font-weight: 700; }
      footer { text-align: center; color: #6b7280; font-size: 12px; padding: 24px; }
    </style>
  </head>
  <body>
    <header>
      <div class="header-row">
        <h1>__EXPORT_TITLE__</h1>
        <span class="badge">Standalone HTML</span>
      </div>
    </header>
    <main class="container">
      <div class="row grid-2" style="align-items: start">
        <section>
          <h2 style="font-size: 22px; margin: 0 0 8px 0">Overview</h2>
          __EXPORT_OVERVIEW__
        </section>
        <section class="card">
          <h3 style="margin: 0 0 8px 0">Interactive Parabola</h3>
          <div class="row grid-3">
            <label>a<input id="a" type="range" /><div class="value">Value: <span id="val_a"></span></div></label>
            <label>b<input id="b" type="range" /><div class="value">Value: <span id="val_b"></span></div></label>
            <label>c<input id="c" type="range" /><div class="value">Value: <span id="val_c"></span></div></label>
          </div>
          <canvas id="graph"></canvas>
          <div class="row grid-2">
            <div class="card" style="background: #eef2ff">
              <div><b>Vertex:</b> <span id="vertex"></span></div>
              <div><b>Axis:</b> <span id="axis"></span></div>
              <div><b>Opens:</b> <span id="opens"></span></div>
            </div>
            <div class="card" style="background: #ecfdf5">
              <div><b>Discriminant:</b> <span id="disc"></span></div>
              <div><b>Roots:</b> <span id="roots"></span></div>
              <div><b>y-intercept:</b> <span id="yint"></span></div>
            </div>
          </div>
        </section>
      </div>
      <section class="card" style="margin-top: 16px">
        <h2 style="margin: 0 0 8px 0">Evaluate f(x)</h2>
        <div class="row grid-2" style="align-items: end">
          <label>x<input id="x_eval" type="number" /></label>
          <div class="card" style="background: #eff6ff">
            <div id="f_text" style="font-size: 14px"></div>
            <div id="f_value" style="font-size: 18px; font-weight: 600"></div>
          </div>
        </div>
      </section>
      <section class="card" style="margin-top: 16px">
        <h2 style="margin: 0 0 8px 0">Multiple-Choice Practice</h2>
        <ol id="q-list" style="padding-left: 18px"></ol>
        <div style="display: flex; gap: 8px; align-items: center">
          <button id="check" class="btn">Check Answers</button>
          <button id="reset" class="btn secondary">Reset</button>
          <div id="score"></div>
        </div>
      </section>
    </main>
    <footer>__EXPORT_FOOTER__</footer>
    <script>
      (() => {
        const CONFIG = __EXPORT_CONFIG__;
        const $ = (selector) => document.querySelector(selector);
        const $$ = (selector) => Array.from(document.querySelectorAll(selector));

        const state = {
          a: CONFIG.coefficients.a,
          b: CONFIG.coefficients.b,
          c: CONFIG.coefficients.c,
          x: CONFIG.evaluationPoint,
          answers: {},
          submitted: false,
        };

        // Math engine
        function discriminant(a, b, c) {
          return b * b - 4 * a * c;
        }

        function vertex(a, b, c) {
          const xv = -b / (2 * a);
          return { x: xv, y: a * xv * xv + b * xv + c };
        }

        function realRoots(a, b, c) {
          const d = discriminant(a, b, c);
          if (d < 0) return [];
          if (d === 0) return [-b / (2 * a)];
          const sqrtD = Math.sqrt(d);
          let first = (-b - sqrtD) / (2 * a);
          let second = (-b + sqrtD) / (2 * a);
          if (first > second) {
            const swap = first;
            first = second;
            second = swap;
          }
          return [first, second];
        }

        function evaluate(a, b, c, x) {
          return a * x * x + b * x + c;
        }

        function deriveGeometry(a, b, c) {
          return { discriminant: discriminant(a, b, c), vertex: vertex(a, b, c), roots: realRoots(a, b, c) };
        }

        function formatFixed(value, digits) {
          return Number(value).toFixed(digits);
        }

        function formatNumber(value) {
          return String(value);
        }

        function parseEvaluationPoint(text) {
          const trimmed = String(text).trim();
          const value = Number(trimmed);
          return trimmed !== '' && Number.isFinite(value) ? value : 0;
        }

        // View window
        function computeViewport(a, b, c, geometry) {
          const xv = geometry.vertex.x;
          const radius = CONFIG.viewport.sampleRadius;
          const sampleXs = [];
          for (let i = -radius; i <= radius; i++) sampleXs.push(i + xv);
          const sampleYs = sampleXs.map((x) => evaluate(a, b, c, x));
          return {
            minX: Math.min(-radius + xv, ...sampleXs) - CONFIG.viewport.xPadding,
            maxX: Math.max(radius + xv, ...sampleXs) + CONFIG.viewport.xPadding,
            minY: Math.min(...sampleYs, c) - CONFIG.viewport.yPadding,
            maxY: Math.max(...sampleYs, c) + CONFIG.viewport.yPadding,
          };
        }

        // Coordinate mapper
        function clampedSpan(span) {
          return span > CONFIG.mapperEpsilon ? span : CONFIG.mapperEpsilon;
        }

        function createMapper(view, W, H) {
          const spanX = clampedSpan(view.maxX - view.minX);
          const spanY = clampedSpan(view.maxY - view.minY);
          return {
            x: (x) => ((x - view.minX) / spanX) * W,
            y: (y) => H - ((y - view.minY) / spanY) * H,
          };
        }

        function gridValues(lower, upper) {
          if (!Number.isFinite(lower) || !Number.isFinite(upper)) return [];
          const start = Math.ceil(lower);
          const stop = Math.floor(upper);
          if (stop - start + 1 > CONFIG.gridLineLimit) return [];
          const values = [];
          for (let v = start; v <= stop; v++) values.push(v);
          return values;
        }

        // Renderer
        const canvas = $('#graph');
        canvas.width = CONFIG.canvas.width;
        canvas.height = CONFIG.canvas.height;

        function draw(geometry) {
          const ctx = canvas.getContext('2d');
          const W = canvas.width;
          const H = canvas.height;
          const { a, b, c } = state;
          const style = CONFIG.style;
          const view = computeViewport(a, b, c, geometry);
          const map = createMapper(view, W, H);

          ctx.clearRect(0, 0, W, H);
          ctx.fillStyle = style.background;
          ctx.fillRect(0, 0, W, H);

          ctx.strokeStyle = style.grid.color;
          ctx.lineWidth = style.grid.lineWidth;
          ctx.beginPath();
          gridValues(view.minX, view.maxX).forEach((gx) => {
            const sx = map.x(gx);
            ctx.moveTo(sx, 0);
            ctx.lineTo(sx, H);
          });
          gridValues(view.minY, view.maxY).forEach((gy) => {
            const sy = map.y(gy);
            ctx.moveTo(0, sy);
            ctx.lineTo(W, sy);
          });
          ctx.stroke();

          ctx.strokeStyle = style.axes.color;
          ctx.lineWidth = style.axes.lineWidth;
          ctx.beginPath();
          const yAxisX = map.x(0);
          ctx.moveTo(yAxisX, 0);
          ctx.lineTo(yAxisX, H);
          const xAxisY = map.y(0);
          ctx.moveTo(0, xAxisY);
          ctx.lineTo(W, xAxisY);
          ctx.stroke();

          ctx.strokeStyle = style.curve.color;
          ctx.lineWidth = style.curve.lineWidth;
          ctx.beginPath();
          for (let i = 0; i <= W; i++) {
            const x = view.minX + (i / W) * (view.maxX - view.minX);
            const y = evaluate(a, b, c, x);
            if (i === 0) ctx.moveTo(map.x(x), map.y(y));
            else ctx.lineTo(map.x(x), map.y(y));
          }
          ctx.stroke();

          const marker = style.marker;
          const point = (x, y, color, label) => {
            const sx = map.x(x);
            const sy = map.y(y);
            ctx.fillStyle = color;
            ctx.beginPath();
            ctx.arc(sx, sy, marker.radius, 0, Math.PI * 2);
            ctx.fill();
            ctx.fillStyle = marker.labelColor;
            ctx.font = marker.font;
            ctx.fillText(label, sx + marker.labelOffsetX, sy + marker.labelOffsetY);
          };
          point(geometry.vertex.x, geometry.vertex.y, style.vertexColor, CONFIG.labels.vertex);
          geometry.roots.forEach((root, index) => point(root, 0, style.rootColor, CONFIG.labels.roots[index]));
          point(0, c, style.interceptColor, CONFIG.labels.intercept);
        }

        function updateReadouts(geometry) {
          const { a, c } = state;
          const v = geometry.vertex;
          $('#vertex').textContent = '(' + formatFixed(v.x, 2) + ', ' + formatFixed(v.y, 2) + ')';
          $('#axis').textContent = 'x = ' + formatFixed(v.x, 2);
          $('#opens').textContent = a > 0 ? 'Upward' : 'Downward';
          $('#disc').textContent = formatFixed(geometry.discriminant, 2);
          $('#roots').textContent = geometry.roots.length
            ? geometry.roots.map((r) => formatFixed(r, 2)).join(', ')
            : CONFIG.text.noRealRoots;
          $('#yint').textContent = '(0, ' + formatFixed(c, 2) + ')';
        }

        function updateEvaluation() {
          const { a, b, c, x } = state;
          $('#f_text').textContent = 'f(x) = ' + formatNumber(a) + 'x^2 + ' + formatNumber(b) + 'x + ' + formatNumber(c);
          $('#f_value').textContent = 'f(' + formatNumber(x) + ') = ' + formatFixed(evaluate(a, b, c, x), 3);
        }

        function recompute() {
          const geometry = deriveGeometry(state.a, state.b, state.c);
          draw(geometry);
          updateReadouts(geometry);
          updateEvaluation();
        }

        ['a', 'b', 'c'].forEach((key) => {
          const bounds = CONFIG.sliders[key];
          const input = $('#' + key);
          input.min = bounds.min;
          input.max = bounds.max;
          input.step = bounds.step;
          input.value = state[key];
          $('#val_' + key).textContent = formatFixed(state[key], 1);
          input.addEventListener('input', (event) => {
            state[key] = parseFloat(event.target.value);
            $('#val_' + key).textContent = formatFixed(state[key], 1);
            recompute();
          });
        });

        const xInput = $('#x_eval');
        xInput.value = state.x;
        xInput.addEventListener('input', (event) => {
          state.x = parseEvaluationPoint(event.target.value);
          updateEvaluation();
        });

        // Quiz engine
        const questions = CONFIG.questions;
        const list = $('#q-list');

        function score() {
          return questions.reduce((total, q) => total + (state.answers[q.id] === q.correctOptionIndex ? 1 : 0), 0);
        }

        function optionFeedback(q, index) {
          if (!state.submitted) return 'neutral';
          if (index === q.correctOptionIndex) return 'correct';
          if (state.answers[q.id] === index) return 'incorrect';
          return 'neutral';
        }

        function renderFeedback() {
          questions.forEach((q) => {
            $$('.option-row[data-question="' + q.id + '"]').forEach((row) => {
              const index = Number(row.dataset.option);
              row.classList.remove('correct', 'incorrect');
              const feedback = optionFeedback(q, index);
              if (feedback !== 'neutral') row.classList.add(feedback);
            });
            const explain = $('#explain_' + q.id);
            explain.classList.remove('correct', 'incorrect');
            if (!state.submitted) {
              explain.classList.add('hidden');
              explain.textContent = '';
              return;
            }
            const isCorrect = state.answers[q.id] === q.correctOptionIndex;
            explain.classList.remove('hidden');
            explain.classList.add(isCorrect ? 'correct' : 'incorrect');
            explain.innerHTML = (isCorrect ? CONFIG.text.correctPrefix : CONFIG.text.incorrectPrefix) + q.explanationHtml;
          });
          $('#score').textContent = state.submitted ? 'Score: ' + score() + ' / ' + questions.length : '';
        }

        questions.forEach((q) => {
          const item = document.createElement('li');
          item.style.marginBottom = '12px';
          const title = document.createElement('div');
          title.style.fontWeight = '600';
          title.innerHTML = q.titleHtml;
          item.appendChild(title);
          const grid = document.createElement('div');
          grid.className = 'options';
          q.optionsHtml.forEach((optionHtml, index) => {
            const row = document.createElement('label');
            row.className = 'option-row';
            row.dataset.question = q.id;
            row.dataset.option = index;
            const input = document.createElement('input');
            input.type = 'radio';
            input.name = 'q_' + q.id;
            input.addEventListener('change', () => {
              state.answers[q.id] = index;
              renderFeedback();
            });
            const text = document.createElement('span');
            text.innerHTML = optionHtml;
            row.appendChild(input);
            row.appendChild(text);
            grid.appendChild(row);
          });
          item.appendChild(grid);
          const explain = document.createElement('div');
          explain.id = 'explain_' + q.id;
          explain.className = 'explain hidden';
          item.appendChild(explain);
          list.appendChild(item);
        });

        $('#check').addEventListener('click', () => {
          state.submitted = true;
          renderFeedback();
        });

        $('#reset').addEventListener('click', () => {
          state.answers = {};
          state.submitted = false;
          $$('input[type=radio]').forEach((input) => (input.checked = false));
          renderFeedback();
        });

        recompute();
        renderFeedback();
      })();
    </script>
  </body>
</html>
"""
