"""Components layer - single-purpose building blocks.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities, DTOs, exceptions
- components/ = discovery, usage resolution, filesystem (this layer)
- workflows/ = orchestration of components
- services/ = configuration composition, workflow wiring for commands
- interfaces/ = CLI presentation
"""
