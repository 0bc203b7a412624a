import string
import PySimpleGUI as sg
from driver import evaluate, format_line, parse_u64

base_text = sg.Text("base")
base_field = sg.InputText(enable_events=True, key="base")

exponent_text = sg.Text("exponent")
exponent_field = sg.InputText(enable_events=True, key="exponent")

modulus_text = sg.Text("modulus (optional)")
modulus_field = sg.InputText(enable_events=True, key="modulus")

compute = sg.Button("compute", key="compute")

result_field = sg.InputText(disabled=True)


layout = [
    [base_text, base_field],
    [exponent_text, exponent_field],
    [modulus_text, modulus_field],
    [compute],
    [sg.HorizontalSeparator()],

    [result_field],
]


def fetch_value(window: sg.Window, ptr: str) -> int:
    return parse_u64(window[ptr].get(), ptr)


def main():
    window = sg.Window('Fast exponentiation', layout, font=("Consolas", 16),
                       resizable=True, size=(800, 300))

    while True:
        event, values = window.read()
        if event == sg.WIN_CLOSED or event == "Exit":
            break
        elif event in ["base", "exponent", "modulus"]:
            edited_field = window[event]
            text = edited_field.get()
            text: str = "".join(filter(lambda c: c in string.digits, text))
            edited_field.update(value=text, move_cursor_to=None)

        elif event == "compute":
            try:
                base = fetch_value(window, "base")
                exponent = fetch_value(window, "exponent")
                modulus = None
                if modulus_field.get().strip():
                    modulus = fetch_value(window, "modulus")
                evaluation = evaluate(base, exponent, modulus)
            except ValueError as e:
                sg.Popup(f"ERROR: {e.args[0]}")
                continue

            result_field.update(value=format_line(evaluation))

    window.close()


if __name__ == "__main__":
    main()
