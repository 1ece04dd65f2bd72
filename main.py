import dearpygui.dearpygui as dpg
from yeardial.core.settings import DialSettings
from yeardial.ui.main_window import MainWindow

def main():
    dpg.create_context()
    dpg.create_viewport(title="Year Dial", width=340, height=280)
    MainWindow(DialSettings.load())
    dpg.setup_dearpygui(); dpg.show_viewport()
    dpg.start_dearpygui(); dpg.destroy_context()

if __name__ == "__main__":
    main()
