"""Gradio user interface"""
